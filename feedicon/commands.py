import click
from .exceptions import IconError
from .models import FetchOptions
import feedicon.feed as feed
import feedicon.finder as finder


FETCH_OPTIONS = [
    click.option('-u', '--user-agent', default=None, help='User-Agent header sent with requests'),
    click.option('--proxy', 'fetch_via_proxy', is_flag=True, default=False,
                 help='Fetch via the configured HTTP proxy'),
    click.option('--allow-self-signed', 'allow_self_signed_certificates', is_flag=True,
                 default=False, help='Do not validate TLS certificates'),
    click.option('-o', '--output', type=click.Path(dir_okay=False, writable=True),
                 help='Save icon to file'),
    click.option('--data-uri', is_flag=True, default=False, help='Print icon as a data:URI'),
]


def fetch_options(command):
    '''
    Add the options shared by icon commands
    '''
    for option in reversed(FETCH_OPTIONS):
        command = option(command)
    return command


def add_commands(app):

    def make_options(**kwargs):
        # Flags turned off leave config settings in place
        return FetchOptions.from_config(
            app.config, **{k: v or None for k, v in kwargs.items()})

    def run(label, find, output, data_uri):
        try:
            icon = find()
        except IconError as exc:
            app.logger.warning("could not find icon for %s (%s)" % (label, exc))
            raise click.ClickException(str(exc))

        print(f"Found icon for {label}")
        print(f"  hash: {icon.hash}")
        print(f"  type: {icon.mime_type}")
        print(f"  size: {icon.size} bytes")
        if output:
            with open(output, 'wb') as f:
                f.write(icon.content)
            print(f"Icon saved to {output}")
        if data_uri:
            print(icon.as_data_uri())
        return icon

    @app.cli.command("find", help="Find the icon of a website.")
    @click.argument('website_url')
    @click.option('-i', '--icon-url', default='', help='Icon URL supplied by the feed, if any')
    @fetch_options
    def command_find(website_url, icon_url, user_agent, fetch_via_proxy,
                     allow_self_signed_certificates, output, data_uri):
        options = make_options(user_agent=user_agent,
                               fetch_via_proxy=fetch_via_proxy,
                               allow_self_signed_certificates=allow_self_signed_certificates)
        run(website_url, lambda: finder.find_icon(website_url, icon_url, options),
            output, data_uri)

    @app.cli.command("find-feed", help="Find the icon of the website publishing a feed.")
    @click.argument('feed_url')
    @fetch_options
    def command_find_feed(feed_url, user_agent, fetch_via_proxy,
                          allow_self_signed_certificates, output, data_uri):
        options = make_options(user_agent=user_agent,
                               fetch_via_proxy=fetch_via_proxy,
                               allow_self_signed_certificates=allow_self_signed_certificates)
        run(feed_url, lambda: feed.find_feed_icon(feed_url, options),
            output, data_uri)
