# main.py - Inference smoke test
"""
ORT Inference Smoke Test
========================
Load a converted model, run it once on placeholder data, report sizes and timing.

    python main.py --model /tmp/test/model.ort
"""

import sys

from ort_smoke.cli import main

if __name__ == "__main__":
    sys.exit(main())
