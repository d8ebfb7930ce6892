"""console script entrypoint for the fbc CLI."""


def run() -> None:
    from .main import app

    app(prog_name="fbc")


def main() -> None:
    """Console entrypoint used by setuptools script hooks."""
    run()


if __name__ == "__main__":
    run()
