import sys

from dibble.cli.dibble import main

if __name__ == '__main__':
    sys.exit(main())
