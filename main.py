#!/usr/bin/env python3
"""
Main entry point for the lineirc client
"""

from lineirc.app import run

if __name__ == "__main__":
    run()
