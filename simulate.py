#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dynsched import cli

if __name__ == '__main__':
    cli.main()
