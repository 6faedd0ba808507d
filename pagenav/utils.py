import json

import click


def bool_from_string(val, default=None):
    if val in (True, False, 1, 0):
        return bool(val)
    if isinstance(val, str):
        val = val.lower()
        if val in ("true", "yes", "1"):
            return True
        if val in ("false", "no", "0"):
            return False
    return default


def int_from_string(val, default=None):
    if isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    if isinstance(val, str):
        try:
            return int(val.strip())
        except ValueError:
            pass
    return default


def echo_json(data):
    click.echo(json.dumps(data, indent=2).rstrip())
