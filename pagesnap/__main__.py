from pagesnap.cli.app import app

app()
