from replicadash.cli import app

app(prog_name="replicadash")
