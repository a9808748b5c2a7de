#!/usr/bin/env python3
'''
Hide messages inside PNG files.

 $ pngsecret.py encode image.png ruSt "meet me at midnight"
 $ pngsecret.py decode image.png ruSt
'''
import logging
import os
import sys

from stegchunk import commands
from stegchunk.exceptions import StegChunkException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} encode <png file path> <chunk type> <message> [output path]
       {progname} decode <png file path> <chunk type>
       {progname} remove <png file path> <chunk type> [output path]
       {progname} print  <png file path>''')
    sys.exit(1)


def run(command, args):
    if command == 'encode' and len(args) in (3, 4):
        commands.encode(*args)
        print('Message encoded!')
    elif command == 'decode' and len(args) == 2:
        print(f'Hidden message is: {commands.decode(*args)}')
    elif command == 'remove' and len(args) in (2, 3):
        chunk = commands.remove(*args)
        print(f'Chunk {chunk.type} removed!')
    elif command == 'print' and len(args) == 1:
        print('The following chunks can be decoded:')
        for type_text in commands.print_chunks(*args):
            print(type_text)
    else:
        usage(sys.argv[0])


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    command = sys.argv[1]

    try:
        run(command, sys.argv[2:])
    except StegChunkException as e:
        logger.error(f'{command} failed with {e.__class__.__name__}: {e} (chain: {".".join(reversed(e.chain))})')
        sys.exit(1)
    except OSError as e:
        logger.error(f'{command} failed: {e}')
        sys.exit(1)
