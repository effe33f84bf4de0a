import logging
import os
import sys
from gettext import gettext as _

from csv_annotator.core.annotation import build_keymap, default_config
from csv_annotator.core.errors import AnnotatorError, ConfigError
from csv_annotator.core.table import load_records, save_records
from csv_annotator.utils.env import load_cfg_from_env

logger = logging.getLogger(__name__)

DEFAULT_ANNOTATION_COLUMN = "annotation"


def check_args(args):
    for flag, value in (
        ("--input", args.input),
        ("--output", args.output),
        ("--text", args.text),
    ):
        if value is None or not str(value).strip():
            raise ConfigError(
                _("Please provide input file, output file, and column to annotate ({flag} is empty)").format(
                    flag=flag
                )
            )


def load_config(env=None):
    try:
        cfg = load_cfg_from_env(default_config(), os.environ if env is None else env)
        build_keymap(cfg.keys)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return cfg


def annotate(args, run_session=None, env=None):
    """
    Load the table, run the interactive session, write the result.

    Returns:
        Number of rows written
    """
    check_args(args)
    cfg = load_config(env)

    records = load_records(args.input, args.text, args.annotation)

    if run_session is None:
        from csv_annotator.interfaces import run_annotator as run_session

    annotated = run_session(records, cfg)

    annotation_column = args.annotation or DEFAULT_ANNOTATION_COLUMN
    return save_records(args.output, annotated, annotation_column)


def handle(args):
    try:
        annotate(args)
    except AnnotatorError as e:
        logger.error(str(e))
        sys.exit(1)
    print(_("Annotations saved to {path}").format(path=args.output))
