#!/usr/bin/env python3
from greeting_server import MODIFIED_GREETING, start


def main():
    start(MODIFIED_GREETING)


if __name__ == "__main__":
    main()
