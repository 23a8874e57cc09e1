#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import click
import logging

from ldp_webclient.version import __version__
from ldp_webclient.client import WebClient
from ldp_webclient.exceptions import LDPClientError
from ldp_webclient.iterators import ContainerWalker
from ldp_webclient.loggers import create_loggers
from ldp_webclient.model import Config


class CredentialsParamType(click.ParamType):
    """A custom credentials parameter type.

    This class produces a tuple(username, password) from a string in the
    form username:password.
    """
    name = 'credentials'

    def convert(self, value, param, ctx):
        try:
            auth = tuple(value.split(":", 1))
            if len(auth) == 2:
                return auth
            else:
                raise ValueError
        except ValueError:
            self.fail('Credentials must be given in the form user:password.',
                      param, ctx)


def _label(resource):
    return resource.name + "/" if resource.is_container() else resource.name


def _record(message):
    """Write a line about a change on the server to the log file."""
    click.get_current_context().meta["loggers"].file_only.info(message)


def _resolve(client, url):
    """Relative paths are taken against the configured server."""
    if not url.startswith("http") and client.config.server:
        return client.config.server.rstrip("/") + "/" + url.lstrip("/")
    return url


@click.group()
@click.option('--config', '-c', 'configfile',
              help='Path to a YAML configuration file.',
              type=click.Path(exists=True), default=None)
@click.option('--user', '-u',
              help='Repository credentials in the form of username:password',
              type=CredentialsParamType(), default=None)
@click.option('--logfile', '-l',
              help='Path to log file (to store details of the run).',
              default=None)
@click.option('--loglevel', '-g',
              help='Level of information to output (INFO, WARN, DEBUG, ERROR)',
              default='WARN')
@click.version_option(__version__)
@click.pass_context
def main(ctx, configfile, user, logfile, loglevel):
    """Work with the resources and containers of an LDP server."""
    level = getattr(logging, loglevel.upper(), logging.WARN)
    loggers = create_loggers(level, logfile)
    try:
        config = Config(configfile, loggers.console)
    except LDPClientError as e:
        raise click.ClickException(str(e))
    ctx.meta["loggers"] = loggers
    ctx.obj = WebClient(config=config, auth=user)


@main.command()
@click.option('--recursive', '-r', is_flag=True, default=False,
              help='Descend into sub-containers.')
@click.option('--depth', '-d', type=int, default=None,
              help='Maximum depth when listing recursively.')
@click.argument('url')
@click.pass_obj
def ls(client, url, recursive, depth):
    """List the contents of the container at URL."""
    url = _resolve(client, url)
    if recursive:
        try:
            for level, resource in ContainerWalker(client, url, depth):
                if level:
                    click.echo("  " * (level - 1) + _label(resource))
        except LDPClientError as e:
            raise click.ClickException(str(e))
        return

    try:
        container = client.get(url).resource
    except LDPClientError as e:
        raise click.ClickException(str(e))
    if not container.is_container():
        raise click.ClickException("{0} is not a container".format(url))

    children = dict(container.resources)
    children.update(container.containers)
    for uri in sorted(children):
        click.echo(_label(children[uri]))


@main.command()
@click.argument('url')
@click.pass_obj
def info(client, url):
    """Show the LDP metadata of the resource at URL."""
    url = _resolve(client, url)
    try:
        head = client.head(url)
        options = client.options(url)
    except LDPClientError as e:
        raise click.ClickException(str(e))

    click.echo("url:     {0}".format(head.url))
    click.echo("exists:  {0}".format(head.exists()))
    click.echo("type:    {0}".format(head.content_type() or "-"))
    for rdf_type in sorted(head.types):
        click.echo("rdftype: {0}".format(rdf_type))
    click.echo("acl:     {0}".format(head.acl_absolute_url() or "-"))
    click.echo("meta:    {0}".format(head.meta_absolute_url() or "-"))
    click.echo("allow:   {0}".format(
        ", ".join(sorted(options.allowed_methods)) or "-"))
    if head.is_logged_in():
        click.echo("user:    {0}".format(head.user))


@main.command()
@click.argument('url')
@click.pass_obj
def get(client, url):
    """Print the RDF source of the resource at URL."""
    try:
        response = client.get(_resolve(client, url))
    except LDPClientError as e:
        raise click.ClickException(str(e))
    click.echo(response.raw())


@main.command()
@click.argument('parent')
@click.argument('name')
@click.pass_obj
def mkdir(client, parent, name):
    """Create a container NAME in the container PARENT."""
    try:
        response = client.create_container(_resolve(client, parent), name)
    except LDPClientError as e:
        raise click.ClickException(str(e))
    _record("Created container {0}".format(response.url))
    click.echo(response.url)


@main.command()
@click.argument('url')
@click.pass_obj
def rm(client, url):
    """Delete the resource at URL."""
    url = _resolve(client, url)
    try:
        client.delete(url)
    except LDPClientError as e:
        raise click.ClickException(str(e))
    _record("Deleted {0}".format(url))


if __name__ == "__main__":
    main()
