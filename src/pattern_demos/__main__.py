"""Allow ``python -m pattern_demos``."""
from pattern_demos.cli.main import run

if __name__ == "__main__":
    run()
