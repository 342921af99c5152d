#!/usr/bin/env python
"""
Run script for the marketplace app.
Use: python run.py
Or: streamlit run carmarket/ui/app.py
"""
import sys
import subprocess


def main():
    """Run the Streamlit app."""
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        "carmarket/ui/app.py",
        "--server.port=8502",
        "--browser.gatherUsageStats=false",
    ])


if __name__ == "__main__":
    main()
