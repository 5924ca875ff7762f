"""
Entry point for ``python -m dc_http``.
"""

from dc_http.cli import main

if __name__ == "__main__":
    main()
