"""
Main CLI entry point for oligoprop.

Defines the root command group and its subcommands.
Uses Click framework for argument parsing and help generation.
"""

import json
import logging
import warnings
import click
from pathlib import Path
from typing import Optional

from oligoprop import __version__
from oligoprop.cli.utils import (
    echo_success,
    echo_error,
    echo_warning,
    format_bounded,
    validate_output_path,
)
from oligoprop.core.config import OligoConfig, load_config
from oligoprop.core.errors import ShortSequenceWarning
from oligoprop.core.models import OligoProperties, TM_LABELS, THERMO_METHODS
from oligoprop.properties import calculate_properties_result


# Custom Click context settings for consistent behavior
CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    max_content_width=120,
)


class AliasedGroup(click.Group):
    """
    Click group that accepts unambiguous command prefixes and treats
    underscores and hyphens as equivalent.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        normalized_name = cmd_name.replace("_", "-")

        rv = click.Group.get_command(self, ctx, normalized_name)
        if rv is not None:
            return rv

        matches = [x for x in self.list_commands(ctx) if x.startswith(normalized_name)]
        if not matches:
            return None
        elif len(matches) == 1:
            return click.Group.get_command(self, ctx, matches[0])
        else:
            ctx.fail(f"Ambiguous command '{cmd_name}': could be {', '.join(sorted(matches))}")
            return None


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", prog_name="oligoprop")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output with detailed logging.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress all output except errors.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """
    oligoprop: physicochemical properties of DNA oligonucleotides.

    \b
    Reports for a single oligo:
      GC content and molecular weight
      Melting temperature (6 methods)
      Nearest-neighbor ΔH, ΔS, ΔG (4 parameter sets)
      Potential hairpins and self-dimers

    \b
    Quick start:
      oligoprop analyze ACGTAGAGGACGTN
      oligoprop analyze ACGTAGAGGACGTN --salt 0.1 --format json
    """
    ctx.ensure_object(dict)

    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if verbose and not quiet:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    elif quiet:
        logging.basicConfig(level=logging.ERROR)


def _render_text(props: OligoProperties) -> str:
    lines = [
        f"Sequence:          {props.sequence} ({props.counts.total} nt)",
        f"Counts A/C/G/T/N:  {'/'.join(str(c) for c in props.counts)}",
        f"Self-complementary: {'yes' if props.self_complementary else 'no'}",
        f"GC content:        {format_bounded(props.gc, unit='%')}",
        f"Molecular weight:  {format_bounded(props.molecular_weight, unit='g/mol')}",
        "",
        "Melting temperature (°C)",
    ]
    lines += [
        f"  {label:<16} {format_bounded(tm)}"
        for label, tm in zip(TM_LABELS, props.melting_temps)
    ]
    lines += ["", "Thermodynamics (ΔH kcal/mol, ΔS cal/(K·mol), ΔG kcal/mol)"]
    for method, (dh, ds, dg) in zip(THERMO_METHODS, props.thermo):
        lines.append(
            f"  {method.value:<16} {format_bounded(dh)} | "
            f"{format_bounded(ds)} | {format_bounded(dg)}"
        )
    lines += ["", f"Hairpins ({len(props.hairpins)})"]
    lines += [f"  {h}" for h in props.hairpins]
    lines += ["", f"Dimers ({len(props.dimers)})"]
    lines += [f"  {d}" for d in props.dimers]
    return "\n".join(lines)


@cli.command()
@click.argument("sequence")
@click.option("--salt", type=float, help="Salt concentration in mol/L (default: 0.05).")
@click.option("--primer-conc", type=float, help="Primer concentration in mol/L (default: 50e-6).")
@click.option("--temp", "temperature", type=float, help="Temperature in °C for ΔG (default: 25).")
@click.option("--hp-base", "hairpin_min_stem", type=int,
              help="Minimum paired bases in a hairpin stem (default: 4).")
@click.option("--hp-loop", "hairpin_min_loop", type=int,
              help="Minimum bases in a hairpin loop (default: 2).")
@click.option("--dimer-length", "dimer_min_length", type=int,
              help="Minimum aligned bases for a self-dimer (default: 4).")
@click.option(
    "-c", "--config",
    type=click.Path(exists=True, path_type=Path),
    help="YAML file with default options; command-line values take precedence.",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "tsv", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "-o", "--output",
    type=click.Path(path_type=Path),
    help="Write results to this file instead of stdout.",
)
@click.option("--force", is_flag=True, help="Overwrite existing output file.")
@click.pass_context
def analyze(
    ctx: click.Context,
    sequence: str,
    salt: Optional[float],
    primer_conc: Optional[float],
    temperature: Optional[float],
    hairpin_min_stem: Optional[int],
    hairpin_min_loop: Optional[int],
    dimer_min_length: Optional[int],
    config: Optional[Path],
    output_format: str,
    output: Optional[Path],
    force: bool,
) -> None:
    """
    Calculate properties of a DNA oligonucleotide.

    SEQUENCE may contain A, C, G, T and the ambiguous symbol N (any case).
    With N present, values are midpoints and ± gives the possible range.

    \b
    Example:
      oligoprop analyze GGGGAAACCCC --hp-loop 3 -f tsv -o props.tsv
    """
    quiet = ctx.obj.get("quiet", False)

    base_config = OligoConfig()
    if config is not None:
        loaded = load_config(config)
        if loaded.is_err():
            echo_error(loaded.unwrap_err())
            raise SystemExit(1)
        base_config = loaded.unwrap()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ShortSequenceWarning)
        result = calculate_properties_result(
            sequence,
            base_config,
            salt=salt,
            primer_conc=primer_conc,
            temperature=temperature,
            hairpin_min_stem=hairpin_min_stem,
            hairpin_min_loop=hairpin_min_loop,
            dimer_min_length=dimer_min_length,
        )

    if result.is_err():
        echo_error(str(result.unwrap_err()))
        raise SystemExit(1)

    if not quiet:
        for w in caught:
            if issubclass(w.category, ShortSequenceWarning):
                echo_warning(str(w.message))

    props = result.unwrap()
    if output_format == "json":
        text = json.dumps(props.to_dict(), indent=2)
    elif output_format == "tsv":
        text = props.to_frame().to_csv(sep="\t", index=False)
    else:
        text = _render_text(props)

    if output is None:
        click.echo(text.rstrip("\n"))
        return

    if not validate_output_path(output, overwrite=force):
        raise SystemExit(1)
    output.write_text(text if text.endswith("\n") else text + "\n")
    if not quiet:
        echo_success(f"Results written to {output}")


@cli.command()
def info() -> None:
    """
    Display version and environment information.
    """
    import sys
    import platform

    click.echo(f"oligoprop version: {__version__}")
    click.echo(f"Python version: {sys.version}")
    click.echo(f"Platform: {platform.platform()}")

    click.echo("\nInstalled dependencies:")

    dependencies = {
        "biopython": "Bio",
        "numpy": "numpy",
        "pandas": "pandas",
        "click": "click",
        "pyyaml": "yaml",
    }

    for name, import_name in dependencies.items():
        try:
            module = __import__(import_name)
            version = getattr(module, "__version__", "unknown")
            click.echo(f"  {name}: {version}")
        except ImportError:
            click.echo(f"  {name}: not installed")


if __name__ == "__main__":
    cli()
