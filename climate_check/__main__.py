from climate_check.cli import run

run()
