# stdlib
import json
import logging
import argparse
import getpass
from functools import wraps
from importlib.metadata import version, PackageNotFoundError

# import helpers
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.helpers import jsonify
from cisco_nxapi.clitools import helpers
from cisco_nxapi.nxapi_plumbing import Device
from cisco_nxapi.nxos import SUPPORTED_COMMANDS, get_decoder


def debugging(name):
    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            censor_parameters = ["password"]
            censored_kwargs = {
                k: v if k not in censor_parameters else "*******"
                for k, v in kwargs.items()
            }
            logger.debug(
                "{} - Calling with args: {}, {}".format(name, args, censored_kwargs)
            )
            try:
                r = func(*args, **kwargs)
                logger.debug("{} - Successful".format(name))
                return r
            except Exception as e:
                logger.error("{} - Failed: {}".format(name, e))
                raise

        return wrapper

    return real_decorator


logger = logging.getLogger("cisco_nxapi")


def build_help(argv=None):
    parser = argparse.ArgumentParser(
        description="Command line tool to query Cisco NX-OS devices through NX-API "
        "and decode their responses.",
        epilog="Automate all the things!!!",
    )
    parser.add_argument(
        "--optional_args",
        "-o",
        dest="optional_args",
        action="store",
        help="String with comma separated key=value pairs passed to the device.",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Enables debug mode; more verbosity.",
    )
    subparser = parser.add_subparsers(title="actions")

    decode = subparser.add_parser("decode", help="Decode a saved NX-API response")
    decode.set_defaults(which="decode")
    decode.add_argument(
        dest="command",
        action="store",
        choices=SUPPORTED_COMMANDS,
        help="Show command the response belongs to.",
    )
    decode.add_argument(
        dest="response_file",
        action="store",
        help="File containing the JSON or XML response.",
    )

    show = subparser.add_parser("show", help="Run a show command and decode it")
    show.set_defaults(which="show")
    show.add_argument(
        dest="hostname", action="store", help="Host to run the command on."
    )
    show.add_argument(
        dest="command",
        action="store",
        choices=SUPPORTED_COMMANDS,
        help="Show command to run.",
    )
    show.add_argument(
        "--user",
        "-u",
        dest="user",
        action="store",
        default=getpass.getuser(),
        help="User for authenticating to the host. Default: user running the script.",
    )
    show.add_argument(
        "--password",
        "-p",
        dest="password",
        action="store",
        help="Password for authenticating to the host."
        "If you do not provide a password in the CLI you will be prompted.",
    )

    duration = subparser.add_parser("duration", help="Parse a duration string")
    duration.set_defaults(which="duration")
    duration.add_argument(
        dest="text", action="store", help="e.g. P7DT12H2M5S, 1w2d or 00:04:30"
    )
    args = parser.parse_args(argv)

    if not hasattr(args, "which"):
        args.which = None

    if args.which == "show" and args.password is None:
        password = getpass.getpass("Enter password: ")
        setattr(args, "password", password)

    return args


def check_installed_packages():
    logger.debug("Gathering cisco-nxapi packages")
    try:
        logger.debug("cisco-nxapi=={}".format(version("cisco-nxapi")))
    except PackageNotFoundError:
        logger.debug("cisco-nxapi is not installed")


@debugging("__init__")
def call_instantiating_object(*args, **kwargs):
    return Device(*args, **kwargs)


@debugging("show_parsed")
def call_show_parsed(device, command):
    return device.show_parsed(command)


@debugging("decode")
def call_decode(command, response_file):
    decoder = get_decoder(command)
    with open(response_file, "rb") as f:
        return decoder.parse_body(f)


@debugging("duration")
def call_duration(text):
    d = Duration.parse(text)
    return {"nanoseconds": int(d), "seconds": d.total_seconds(), "iso8601": str(d)}


def run(args):
    if args.which == "decode":
        result = call_decode(args.command, args.response_file)
    elif args.which == "show":
        optional_args = helpers.parse_optional_args(args.optional_args)
        device = call_instantiating_object(
            args.hostname, args.user, password=args.password, **optional_args
        )
        result = call_show_parsed(device, args.command)
    elif args.which == "duration":
        result = call_duration(args.text)
    else:
        logger.error("Please choose an action: decode, show or duration")
        return 1

    print(json.dumps(jsonify(result), indent=4))
    return 0


def main(argv=None):
    args = build_help(argv)
    helpers.configure_logging(logger, debug=args.debug)
    logger.debug("Starting cisco-nxapi's debugging tool")
    check_installed_packages()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
