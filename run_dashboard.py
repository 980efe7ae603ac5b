#!/usr/bin/env python
"""
Launch the Reef Nutrients dashboard in Streamlit.

Usage:
    python run_dashboard.py [streamlit options]

    or run the app directly:

    streamlit run reef_nutrients/app.py
"""

import subprocess
import sys
from pathlib import Path

APP_PATH = Path(__file__).parent / "reef_nutrients" / "app.py"


def main() -> int:
    if not APP_PATH.exists():
        print(f"Error: App not found at {APP_PATH}")
        return 1

    # Extra arguments (e.g. --server.port 8502) go straight to streamlit
    completed = subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(APP_PATH),
        "--browser.gatherUsageStats", "false",
        *sys.argv[1:],
    ])
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
