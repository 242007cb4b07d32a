class PNGMeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes as argument the chain of the layers that caused the exception,
    each layer re-raising it is expected to append its own name.
    '''

    def __init__(self, chain=None, reason=None):
        self.chain = chain if chain is not None else []
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        msg = self.reason or self.__class__.__name__
        if self.chain:
            msg = '%s (at %s)' % (msg, '.'.join(reversed(self.chain)))
        return msg


class InvalidTagException(PNGMeException):
    pass


class UnpackException(PNGMeException):
    pass


class TruncatedInputException(UnpackException):
    pass


class ChecksumMismatchException(UnpackException):
    pass


class MagicException(UnpackException):
    '''The signature at the start of the stream is not the expected one.'''
    pass


class ChunkNotFoundException(PNGMeException):
    pass


class InvalidUtf8Exception(PNGMeException):
    pass


class PayloadTooLargeException(PNGMeException):
    pass
