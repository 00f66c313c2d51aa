import sys

from prompter.main import main

sys.exit(main())
