"""Make kvs package runnable as a module."""

from .server import main

if __name__ == '__main__':
    main()
