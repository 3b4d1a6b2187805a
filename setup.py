from setuptools import setup


def main():
    # Project metadata lives in pyproject.toml; there are no extension
    # modules to build.
    setup()


if __name__ == "__main__":
    main()
