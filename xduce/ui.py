from docopt import docopt
from xduce.chain import tr
from xduce.transducer import mapping, each
from xduce.transduce import consume
from xduce.scenarios import SCENARIOS, get_scenario, render
import sys

UI_USAGE = """
Xduce

Usage:
  xduce list
  xduce run [<scenario>...]
  xduce run --all

Options:
  --all  Run every scenario.
"""

lines_printr = tr | each(print)

def scenario_printr(scenario):
    print("== %s: %s" % (scenario.name, scenario.description))
    consume(lines_printr, render(scenario.run()))

def ui_main():
    result = xduce_ui(sys.argv[1:])
    exit(result)

def xduce_ui(argv):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    if args['list']:
        consume(tr | mapping(lambda s: "%s\t%s" % (s.name, s.description)) | each(print),
                sorted(SCENARIOS.values()))
    elif args['run']:
        names = args['<scenario>']
        if args['--all'] or not names:
            names = sorted(SCENARIOS.keys())
        for name in names:
            try:
                scenario = get_scenario(name)
            except ValueError as e:
                print(e)
                exitcode = exitcode | 1
                continue
            scenario_printr(scenario)
    return exitcode
