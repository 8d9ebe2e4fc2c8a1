"""Lexical analysis for the sexpr language. Tokens are matched lazily, one at a time, from a single source line.

At each position, after skipping whitespace (space, tab, newline), the first rule that matches wins:

```
<eof>         ::= end of input
<single>      ::= "(" | ")" | "+" | "-" | "*" | "/"
<int>         ::= [0-9_]+                           ; longest of <int>/<float> wins
<float>       ::= [0-9_]+ "." [0-9_]+               ; exactly one point, digits on both sides
<bool>        ::= "true" | "false"                  ; only as a whole word (followed by whitespace/end)
<let>         ::= "let"                             ; longest of <let>/<identifier> wins, ties go to <let>
<identifier>  ::= [a-zA-Z] [a-zA-Z0-9_]*
<unknown>     ::= any run of non-whitespace characters
```

Literal text is not converted to numbers here, see parser.py.
"""

import re

from sexpr.syntax.token import Token, Type


WHITESPACE = re.compile(r"[ \t\n]*")

SINGLE = {
    "(": Type.OPEN_PAREN,
    ")": Type.CLOSE_PAREN,
    "+": Type.PLUS,
    "-": Type.MINUS,
    "*": Type.MULTIPLY,
    "/": Type.DIVIDE,
}

INT = re.compile(r"[0-9_]+")
FLOAT = re.compile(r"[0-9_]+\.[0-9_]+(?![0-9_.])")  # a second point anywhere rejects the whole literal
BOOL = re.compile(r"(?:true|false)(?=[ \t\n]|\Z)")
KEYWORD = re.compile(r"let")
IDENTIFIER = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")
UNKNOWN = re.compile(r"[^ \t\n]+")


class Lexer:
    """Tokenizes source with one token of lookahead. Once the end of source is reached, take keeps returning the EOF
    token.
    """

    def __init__(self, source):
        self.source = source
        self.idx = 0
        self.next_token = self._match()

    def peek(self):
        """Returns the next token without consuming it."""
        return self.next_token

    def take(self):
        """Consumes and returns the next token."""
        token = self.next_token
        if token.kind is not Type.EOF:
            self.next_token = self._match()
        return token

    def __iter__(self):
        """Yields the remaining tokens, excluding EOF."""
        while self.peek().kind is not Type.EOF:
            yield self.take()

    def _match(self):
        """Matches the token starting at self.idx (after whitespace) and advances self.idx past it."""
        start = WHITESPACE.match(self.source, self.idx).end()

        if start >= len(self.source):
            self.idx = start
            return Token(Type.EOF, "", start)

        char = self.source[start]
        if char in SINGLE:
            token = Token(SINGLE[char], char, start)
        else:
            token = (self._number(start) or self._bool(start) or self._keyword_or_identifier(start)
                     or self._token(UNKNOWN, Type.UNKNOWN, start))

        self.idx = token.end
        return token

    def _token(self, pattern, kind, start):
        match = pattern.match(self.source, start)
        if match is None:
            return None
        return Token(kind, match.group(), start)

    @staticmethod
    def _longest(first, second):
        """Returns the token that consumed more characters; first wins ties."""
        if first is None or (second is not None and len(second.text) > len(first.text)):
            return second
        return first

    def _number(self, start):
        return self._longest(self._token(INT, Type.INT, start), self._token(FLOAT, Type.FLOAT, start))

    def _bool(self, start):
        return self._token(BOOL, Type.BOOL, start)

    def _keyword_or_identifier(self, start):
        # guards against identifiers such as "letter" that start with a keyword
        keyword = self._token(KEYWORD, Type.LET, start)
        identifier = self._token(IDENTIFIER, Type.IDENTIFIER, start)
        return self._longest(keyword, identifier)
