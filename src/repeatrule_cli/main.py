"""Main entry point for RepeatRule CLI."""

import typer

from repeatrule_cli.commands import config
from repeatrule_cli.commands.decode_command import decode_command
from repeatrule_cli.commands.descriptor_command import (
    descriptor_command,
    import_descriptor_command,
)
from repeatrule_cli.commands.encode_command import encode_command
from repeatrule_cli.commands.presets_command import presets_command
from repeatrule_cli.commands.preview_command import preview_command
from repeatrule_cli.commands.version_command import version
from repeatrule_cli.services.config_service import get_config_service
from repeatrule_cli.utils.typer_helpers import SuggestingGroup
from repeatrule_cli.utils.ui import formatters
from repeatrule_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="repeatrule",
    cls=SuggestingGroup,
    help="Build, convert and preview recurring-event rules (RRULE)",
    no_args_is_help=True,
)


@app.callback()
def configure_output() -> None:
    """Apply output settings from the configuration."""
    if not get_config_service().config.output.color:
        for console in (
            formatters.console,
            config.console,
            get_console(),
            get_console(highlight=False),
        ):
            console.no_color = True


app.add_typer(config.app, name="config", help="Configuration management")

app.command("encode")(encode_command)
app.command("decode")(decode_command)
app.command("descriptor")(descriptor_command)
app.command("import-descriptor")(import_descriptor_command)
app.command("preview")(preview_command)
app.command("presets")(presets_command)
app.command("version")(version)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
