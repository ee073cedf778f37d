"""Allow running the CLI with ``python -m blockade_client``."""

from blockade_client.cli.main import main


if __name__ == "__main__":
    main()
