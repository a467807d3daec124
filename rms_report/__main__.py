from rms_report.cli import app

app()
