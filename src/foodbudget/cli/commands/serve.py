"""Relay server command."""

import click

from foodbudget.relay.app import create_app


@click.command("serve")
@click.option("--host", help="Interface to bind (overrides FOODBUDGET_HOST)")
@click.option("--port", type=int, help="Port to listen on (overrides PORT)")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
@click.pass_context
def serve(ctx, host: str | None, port: int | None, debug: bool):
    """Run the AI relay HTTP server."""
    settings = ctx.obj["settings"]
    app = create_app(settings)
    host = host or settings.host
    port = port or settings.port
    click.echo(f"Relay listening on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
