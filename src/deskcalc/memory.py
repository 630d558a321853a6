class MemoryRegister:
    '''
    Single accumulating memory register (MC, MR, M+, M-).

    No overflow protection: non-finite operands accumulate like any other.
    '''

    DEFAULT_VALUE = 0.0

    def __init__(self):
        self.value = type(self).DEFAULT_VALUE

    def clear(self):
        '''
        Reset register to zero.
        '''
        self.value = type(self).DEFAULT_VALUE

    def recall(self):
        return self.value

    def add(self, operand):
        self.value += operand

    def subtract(self, operand):
        self.value -= operand
