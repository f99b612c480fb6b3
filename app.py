#!/usr/bin/env python3
from greeting_server import GREETING, start


def main():
    start(GREETING)


if __name__ == "__main__":
    main()
