from __future__ import annotations

import sys

from iteration_bench.cli import main

sys.exit(main())
