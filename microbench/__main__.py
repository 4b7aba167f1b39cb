import sys

from .tools.bench_cli import main

sys.exit(main())
