from b64url.cli.main import app

app(prog_name="b64url")
