"""
Command line entry point: an invoke Program over the reqres-probe tasks.
"""

from invoke import Program

from reqres_probe import __version__, build_namespace

program = Program(namespace=build_namespace(), version=__version__, name='reqres-probe')
