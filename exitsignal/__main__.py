# exitsignal/__main__.py

from exitsignal.cli.main import main

if __name__ == "__main__":
    main(prog_name="exitsignal")
