import sys

from autorizador.cli import main

sys.exit(main())
