"""Run the mock OAuth2 flow against a live oauth2-proxy + Dex deployment.

Run with:
    TARGET_URL=http://172.30.0.4:4180 python scripts/run_mock_flow.py

Exit code 0 means the proxy let us through after the mock consent.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running from a checkout without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mockflow.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
