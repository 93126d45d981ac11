#!/usr/bin/env python3
"""Command-line entry point which runs the provenance engine."""

import argparse
import os

import yaml

from genprov.driver import Driver
from genprov.version import __version__


def main(config, source, source_list, output, n, nskip):
    """Main driver for provenance processing.

    Performs these basic functions:
    - Update the configuration with the command-line arguments
    - Run the driver over the requested entries

    Parameters
    ----------
    config : str
        Path to the configuration file
    source : List[str]
        List of paths to the input files
    source_list : str
        Path to a text file containing a list of data file paths
    output : str
        Path to the output file
    n : int
        Number of entries to process
    nskip : int
        Number of entries to skip
    """
    # Try to find configuration file using the absolute path or under
    # the 'config' directory relative to the current working directory
    cfg_file = config
    if not os.path.isfile(cfg_file):
        cfg_file = os.path.join("config", config)
    if not os.path.isfile(cfg_file):
        raise FileNotFoundError(f"Configuration not found: {config}")

    # Load the configuration file
    with open(cfg_file, "r", encoding="utf-8") as cfg_yaml:
        cfg = yaml.safe_load(cfg_yaml)

    # The configuration must minimally contain an IO block with a reader
    assert "io" in cfg, "Must provide an `io` block in the configuration."
    if "reader" not in cfg["io"]:
        raise KeyError("Must specify a `reader` in the `io` block.")

    # Override the input/output command-line information into the configuration
    if (source is not None and len(source) > 0) or source_list is not None:
        cfg["io"]["reader"]["file_keys"] = source or source_list

    if n is not None:
        cfg["io"]["reader"]["n_entry"] = n

    if nskip is not None:
        cfg["io"]["reader"]["n_skip"] = nskip

    if output is not None and "writer" in cfg["io"]:
        cfg["io"]["writer"]["file_name"] = output

    # Process the requested entries
    driver = Driver(cfg)
    driver.run()


def cli():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="genprov - Provenance Flattening & Attribution Engine"
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"genprov {__version__}"
    )

    parser.add_argument(
        "-c", "--config", required=True, help="Path to the configuration file"
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-s", "--source", nargs="+", type=str, help="List of paths to the input files"
    )
    group.add_argument(
        "-S",
        "--source-list",
        help="Path to a text file containing a list of data file paths",
    )

    parser.add_argument("-o", "--output", help="Path to the output file")

    parser.add_argument("-n", "--iterations", type=int, help="Number of entries to run")

    parser.add_argument("--nskip", type=int, help="Number of entries to skip")

    args = parser.parse_args()

    main(
        config=args.config,
        source=args.source,
        source_list=args.source_list,
        output=args.output,
        n=args.iterations,
        nskip=args.nskip,
    )


if __name__ == "__main__":
    cli()
