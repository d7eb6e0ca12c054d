from collections import namedtuple
from functools import reduce
import operator

import regex


Token = namedtuple('Token', ['kind', 'text'])

LITERAL = 'literal'
OPERATOR = 'operator'


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Holds no internal state; lexing a line and classifying a token are pure.
    '''
    # Number, as accepted on input.
    NUMBER = r'''
              # A sign, but never a sign alone: - alone is subtraction.
              [+-]?
              (?=[0-9.])
              # 1, 12, 1. (notice trailing dot), .2, 1.3, and, sadly, a lone .
              [0-9]*
              (?:
                  \.
                  [0-9]*
              )?
              '''
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all its tokens, classified.
        '''
        for text in regex.split(type(self).SPACE, line):
            if text:
                yield self.classify(text)

    def classify(self, text):
        '''
        Return a Token of kind LITERAL or OPERATOR for a single lexeme.

        Anything that isn't a number is taken to be an operator; whether it
        actually is one is the machine's problem.
        '''
        if self.isliteral(text):
            return Token(LITERAL, text)
        return Token(OPERATOR, text)

    def isliteral(self, text):
        '''
        Return True if text is a number literal, rather than an operator.
        '''
        return regex.fullmatch(type(self).NUMBER, text,
                               flags=type(self).FLAGS) is not None
