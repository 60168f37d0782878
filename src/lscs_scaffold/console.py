"""Colored progress messages for the scaffolder."""

import click


def banner(message):
    click.secho(message, fg="bright_blue", bold=True)


def step(message):
    click.secho(message, fg="blue")


def success(message):
    click.secho(message, fg="green")


def info(message):
    click.echo(message)


def warn(message):
    click.secho(message, fg="yellow", err=True)
