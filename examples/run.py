import sys
from pathlib import Path

from bitblocks.cli import main

if __name__ == '__main__':
    argv = sys.argv[1:]
    if '-i' not in argv and '--input' not in argv:
        argv = ['-i', str(Path(__file__).parent / 'designs'), *argv]
    sys.exit(main(argv))
