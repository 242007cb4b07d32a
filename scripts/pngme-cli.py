#!/usr/bin/env python3
'''
 $ pngme-cli.py encode image.png ruSt "This is where your secret message will be!"
'''
import sys

from pngme.cli import main


if __name__ == '__main__':
    sys.exit(main(sys.argv))
