"""
Streamlit launcher for the GPT Insight dashboard.
Picks a free local port, starts Streamlit on app.py and opens the browser
once the server accepts connections.
"""

import os
import socket
import subprocess
import sys
import time
import webbrowser

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

THEME_PRIMARY = "#00C2C2"


def find_free_port():
    """Find an available TCP port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def wait_for_server(port, attempts=30, interval=0.5):
    """Return True once something listens on *port*."""
    for _ in range(attempts):
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=1):
                return True
        except OSError:
            time.sleep(interval)
    return False


def main():
    port = find_free_port()
    app_py = os.path.join(ROOT, "app.py")

    if not os.path.isfile(app_py):
        print(f"ERROR: app.py not found at {app_py}")
        sys.exit(1)

    url = f"http://localhost:{port}"
    print(f"Starting GPT Insight on {url} ...")

    cmd = [
        sys.executable, "-m", "streamlit", "run", app_py,
        "--server.port", str(port),
        "--server.headless", "true",
        "--server.address", "127.0.0.1",
        "--browser.gatherUsageStats", "false",
        "--theme.base", "light",
        "--theme.primaryColor", THEME_PRIMARY,
    ]

    proc = subprocess.Popen(cmd, cwd=ROOT)
    if wait_for_server(port):
        webbrowser.open(url)
    else:
        print("Server did not come up in time; open the URL manually.")

    print("GPT Insight is running. Close this window or press Ctrl+C to stop.")

    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down GPT Insight...")
        proc.terminate()
        try:
            proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            proc.kill()


if __name__ == "__main__":
    main()
