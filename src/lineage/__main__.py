from lineage.cli.app import app

app(prog_name="lineage")
