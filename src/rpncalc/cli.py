from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import sys
import traceback

from prompt_toolkit import PromptSession

from .util import RPNError
from .machine import Machine


BANNER = '''\
RPN calculator
Enter an expression (e.g., '5 5 +'), 'q' to quit, 'help' for help.'''

HELP = '''\
Operators:
  +   -   *   /   : arithmetic
  sqrt            : square root
  ^               : power
  fib             : Fibonacci number
Commands:
  clear           : clear the stack
  print           : show the stack
  hist            : show history
  help            : show this help
  q               : quit'''


def precision(text):
    '''
    Parse -k: a non-negative number of significant digits.
    '''
    try:
        digits = int(text)
    except ValueError:
        raise ArgumentTypeError('invalid precision {!r}'
                                .format(text)) from None
    if digits < 0:
        raise ArgumentTypeError('precision must not be negative, got {}'
                                .format(digits))
    return digits


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # In memory only; never persisted.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    QUIT = {'q', 'Q'}

    def printhelp(self):
        '''
        Print all operators and commands.
        '''
        print(HELP)

    def printstack(self):
        '''
        Print all elements on the stack, bottom of the stack first.
        '''
        print('Stack:', self.machine.format_stack())

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.machine.clear()
        print('Stack cleared')

    def printhistory(self):
        '''
        Print every successful evaluation so far, numbered from 1.
        '''
        if not len(self.machine.history):
            print('No history')
            return
        print('History:')
        for i, entry in enumerate(self.machine.history, start=1):
            print('{}: {}'.format(i, entry))

    # Lines handled directly, never reaching the machine.
    COMMANDS = {
        'help': printhelp,
        'print': printstack,
        'clear': clrstack,
        'hist': printhistory,
    }

    def executor(self):
        '''
        Run machine (RPN calculator) over every input line.
        '''
        self.machine = Machine(precision=self.args.precision)
        if self._interactive():
            print(BANNER)
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            if line in self.QUIT:
                break
            command = self.COMMANDS.get(line)
            if command is not None:
                command(self)
                continue
            try:
                result = self.machine.evaluate(line)
            # Stack already rolled back; just report and carry on.
            except RPNError as e:
                print('Error:', e.args[0], file=sys.stderr)
                if self.args.verbose:
                    traceback.print_exc()
            else:
                print('Result:', self.machine.format(result))

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show stack traces on errors')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=precision,
                                          help='significant digits on output')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return 0
