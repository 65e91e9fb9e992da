"""Allow ``python -m investigator``."""

from investigator.main import run

if __name__ == "__main__":
    run()
