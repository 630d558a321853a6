from decimal import Decimal
import math

import regex


class NumberFormatter:
    '''
    Conversions between floats and the text shown on the calculator display.

    For consistency with the lexer, needs to be instantiated, despite holding
    no internal state.
    '''

    # Sentinel shown for any result without a finite answer
    ERROR = 'Error'
    # Magnitudes above OVERFLOW, or nonzero below UNDERFLOW, go exponential
    OVERFLOW = 1e12
    UNDERFLOW = 1e-9
    # Decimal places kept in results; also the exponential mantissa digits
    PRECISION = 9
    # plain() writes magnitudes in this range out in full, like a pocket
    # calculator would, and goes exponential outside it
    PLAIN_MIN = 1e-7
    PLAIN_MAX = 1e21

    # Leading number of a display string. Anything after it is ignored, and
    # no leading number at all parses as NaN.
    NUMBER = r'''
              [+-]?
              (?:
                  # 12, 12. (notice trailing dot), 12.5
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              )|(?:
                  [+-]?
                  # .5
                  \.
                  \d+
              )
              '''
    EXPONENT = r'''
                # As written by exponential(): 1.500000000e+18
                [eE]
                [+-]?
                \d+
                '''
    PATTERN = regex.compile(r'(?:' + NUMBER + r')(?:' + EXPONENT + r')?',
                            flags=regex.VERBOSE)

    def format(self, value):
        '''
        Return the canonical display text for a computed result.

        Total: non-finite values give the error sentinel rather than raising.
        '''
        value = float(value)
        if not math.isfinite(value):
            return self.ERROR
        magnitude = abs(value)
        if magnitude > self.OVERFLOW or \
           magnitude != 0 and magnitude < self.UNDERFLOW:
            return self.exponential(value)
        rounded = round(value, self.PRECISION)
        if rounded.is_integer():
            return '{:d}'.format(int(rounded))
        text = repr(rounded)
        if 'e' in text:
            # repr() goes exponential below 1e-4, we want digits
            text = '{:.{}f}'.format(rounded, self.PRECISION).rstrip('0')
        return text

    def exponential(self, value):
        '''
        Return value in exponential notation, PRECISION mantissa digits.
        '''
        value = float(value)
        if not math.isfinite(value):
            return self.ERROR
        text = '{:.{}e}'.format(value, self.PRECISION)
        return self._unpad_exponent(text)

    def plain(self, value):
        '''
        Return value's shortest round-tripping text, unrounded.

        Integral values lose their trailing .0, and negative zero its sign.
        '''
        value = float(value)
        if not math.isfinite(value):
            return self.ERROR
        if value == 0:
            value = 0.0
        text = repr(value)
        if 'e' in text and self.PLAIN_MIN <= abs(value) < self.PLAIN_MAX:
            # Same digits, written out: 1e-05 is 0.00001
            text = format(Decimal(text), 'f')
        if text.endswith('.0'):
            text = text[:-2]
        return self._unpad_exponent(text)

    def parse(self, text):
        '''
        Return the number text starts with, or NaN if it doesn't start with one.
        '''
        match = self.PATTERN.match(text or '')
        if match is None:
            return math.nan
        return float(match.group(0))

    def _unpad_exponent(self, text):
        '''
        Drop the exponent's zero padding: 1e-05 becomes 1e-5.
        '''
        if 'e' not in text:
            return text
        mantissa, exponent = text.split('e')
        return '{}e{:+d}'.format(mantissa, int(exponent))
