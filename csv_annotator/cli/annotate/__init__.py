# flake8: noqa E501

from gettext import gettext as _
from pathlib import Path

COMMAND_DESCRIPTION = _("Interactively annotate the rows of a CSV file")


def command(subparser):
    subparser.add_argument(
        "-i", "--input", dest="input", type=Path, required=True,
        help=_("Input CSV file"),
    )
    subparser.add_argument(
        "-o", "--output", dest="output", type=Path, required=True,
        help=_("Output CSV file"),
    )
    subparser.add_argument(
        "-t", "--text", dest="text", type=str, required=True,
        help=_("Column holding the text to annotate"),
    )
    subparser.add_argument(
        "-a", "--annotation", dest="annotation", type=str, default=None,
        help=_("Column containing existing annotations (written as 'annotation' when unset)"),
    )

    def handle(args):
        from .annotator import handle as annotator_handle

        annotator_handle(args)

    return handle
