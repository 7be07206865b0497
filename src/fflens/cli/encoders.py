"""CLI encoders command: list the hardware encoders fflens can probe."""

import json

import click

from fflens.tools import EncoderTable


@click.command("encoders")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def encoders_command(json_output: bool) -> None:
    """List probeable hardware encoders and their trial parameters."""
    table = EncoderTable.default()

    if json_output:
        rows = []
        for profile in table:
            family = table.family_for(profile)
            rows.append(
                {
                    "encoder": profile.encoder.value,
                    "label": profile.label,
                    "group": profile.group,
                    "trial_params": list(profile.trial_params),
                    "retry_on_failure": bool(
                        family and family.transient_false_negative
                    ),
                }
            )
        click.echo(json.dumps(rows, indent=2))
        return

    for group, profiles in table.groups().items():
        click.echo(f"{group}:")
        for profile in profiles:
            family = table.family_for(profile)
            retried = family is not None and family.transient_false_negative
            retry = " (retried once)" if retried else ""
            click.echo(
                f"  {profile.encoder.value:<12} {profile.label:<16} "
                f"-c:v {profile.trial_params_text}{retry}"
            )
