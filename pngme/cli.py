'''
Command line interface

 $ pngme encode image.png ruSt "secret message" [output.png]
 $ pngme decode image.png ruSt
 $ pngme remove image.png ruSt
 $ pngme print image.png

Set the DEBUG environment variable to have verbose logging.
'''
import logging
import os
import sys

from . import commands
from .exceptions import PNGMeException


logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} encode <png file path> <chunk type> <message> [<output file path>]
       {progname} decode <png file path> <chunk type>
       {progname} remove <png file path> <chunk type>
       {progname} print <png file path>''')
    return 1


def do_encode(path, chunk_type, message, output=None):
    chunk = commands.encode(path, chunk_type, message, output=output)
    print(f'added new chunk {chunk}')


def do_decode(path, chunk_type):
    print(commands.decode(path, chunk_type))


def do_remove(path, chunk_type):
    chunk = commands.remove(path, chunk_type)
    print(f'removed chunk: {chunk}')


def do_print(path):
    print(commands.print_chunks(path))


# command name -> (callable, minimum number of arguments, maximum number of arguments)
COMMANDS = {
    'encode': (do_encode, 3, 4),
    'decode': (do_decode, 2, 2),
    'remove': (do_remove, 2, 2),
    'print': (do_print, 1, 1),
}


def main(argv=None):
    argv = sys.argv if argv is None else argv

    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    progname = os.path.basename(argv[0]) if argv else 'pngme'

    if len(argv) < 2 or argv[1] not in COMMANDS:
        return usage(progname)

    command, n_min, n_max = COMMANDS[argv[1]]
    args = argv[2:]

    if not n_min <= len(args) <= n_max:
        return usage(progname)

    try:
        command(*args)
    except PNGMeException as e:
        logger.error(f'{e.__class__.__name__}: {e}')
        return 1
    except OSError as e:
        logger.error(f'failed to access the file: {e}')
        return 1

    return 0
