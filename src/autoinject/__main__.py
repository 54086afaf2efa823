import sys

from autoinject import main

if __name__ == '__main__':
    sys.exit(main())
