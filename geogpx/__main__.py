"""Allow `python -m geogpx`."""

from geogpx import cli

if __name__ == "__main__":
    cli.main()
