from functools import wraps


class CalculatorError(Exception):
    pass


class DomainError(CalculatorError):
    '''
    Arithmetic has no (finite) answer: division by zero, root of a negative.

    Never escapes the engine; it becomes the display error sentinel.
    '''
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts lookup failures into CalculatorErrors.

    Passes through CalculatorErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except (KeyError, IndexError, ValueError) as e:
                raise CalculatorError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def wrap_domain_errors(f):
    '''
    Decorator that converts arithmetic exceptions into DomainErrors.

    math.sqrt(-1) raises ValueError, x / 0.0 raises ZeroDivisionError.
    '''
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (ArithmeticError, ValueError) as e:
            raise DomainError('No answer for {}{}'.format(f.__name__, args), e)
    return wrapper
