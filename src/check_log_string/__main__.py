"""Module entrypoint.

Allows:
    python -m check_log_string -w 1 -c 3 -f /var/log/app.log -s ERROR
"""

from __future__ import annotations

from check_log_string.cli import main

if __name__ == "__main__":
    main()
