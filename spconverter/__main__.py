from spconverter.cli.app import app

app(prog_name="spconverter")
