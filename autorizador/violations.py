ACCOUNT_NOT_INITIALIZED = "account-not-initialized"
ACCOUNT_ALREADY_INITIALIZED = "account-already-initialized"
INSUFFICIENT_LIMIT = "insufficient-limit"
CARD_NOT_ACTIVE = "card-not-active"
DOUBLED_TRANSACTION = "doubled-transaction"
HIGH_FREQUENCY_SMALL_INTERVAL = "high-frequency-small-interval"
