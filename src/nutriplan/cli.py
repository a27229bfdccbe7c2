"""CLI entry point for nutriplan."""

import logging

import click

from .commands import (
    export,
    generate,
    init,
    language,
    plan,
    profile,
    progress,
    refs,
    reset,
    serve,
)


@click.group()
@click.version_option(version="0.1.0", prog_name="nutriplan")
@click.option("--verbose", "-v", is_flag=True, help="Log AI requests and storage access")
def main(verbose: bool):
    """nutriplan: AI-Powered Nutrition Planner.

    Generate a personalized weekly diet, exercise and supplement plan from
    your biometric and medical profile, and track your progress.

    Example usage:

        # Initialize the project
        nutriplan init

        # Fill in your profile and generate a plan
        nutriplan generate

        # Review the plan and swap a meal
        nutriplan plan show --day 1
        nutriplan plan swap 1 lunch

        # Log your progress and export it
        nutriplan progress log 72.5 84
        nutriplan export pdf
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(generate)
main.add_command(plan)
main.add_command(progress)
main.add_command(export)
main.add_command(profile)
main.add_command(refs)
main.add_command(language)
main.add_command(reset)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
