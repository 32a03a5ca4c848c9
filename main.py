"""Run the PK-Engine command-line interface from a source checkout."""

from pk_engine.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
