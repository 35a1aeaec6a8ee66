"""Allow ``python -m mapping_audit``."""

from mapping_audit.tui.app import main

if __name__ == "__main__":
    main()
