"""
Tracker Image Test Suite

- Settings resolution from the environment
- docker build argument construction and exit status propagation
- CLI behaviour through typer's CliRunner
"""
