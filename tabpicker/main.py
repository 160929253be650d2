from .app import app


def main():
    """main entry point for the tabpicker cli tool"""
    app()


if __name__ == "__main__":
    main()
