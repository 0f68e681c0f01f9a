"""Allow running greet as ``python -m greet``."""

from greet.cli.main import main


if __name__ == "__main__":
    main()
