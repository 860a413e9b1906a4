"""rubyswitch - pick the Ruby declared by the nearest .ruby-version.

Usage:
    eval "$(rubyswitch hook --shell bash)"
    rubyswitch env
    rubyswitch doctor
"""

__version__ = "0.1.0"


def main() -> None:
    from rubyswitch.cli import app

    app()


if __name__ == "__main__":
    main()
