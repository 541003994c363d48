class SearchParamsError(Exception):
    def __init__(self, message, desc=None):
        """Base error for query string handling.

        :param message: error message
        :type message: str

        :param desc: additional detail
        :type desc: str
        """
        super(SearchParamsError, self).__init__(message)

        self.message = message
        self.desc = desc


class MalformedEscapeError(SearchParamsError):
    def __init__(self, message, value=None, position=None, desc=None):
        """Raised when a percent escape can't be decoded.

        :param value: segment containing the escape
        :type value: str

        :param position: index of the offending character in `value`
        :type position: int
        """
        super(MalformedEscapeError, self).__init__(message, desc)

        self.value = value
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message

        return '%s (at position %s in %r)' % (self.message, self.position, self.value)


class UnencodableTextError(SearchParamsError):
    def __init__(self, message, value=None, position=None, desc=None):
        """Raised when text can't be represented in the requested charset.

        :param value: text being escaped
        :type value: str

        :param position: index of the first unencodable character
        :type position: int
        """
        super(UnencodableTextError, self).__init__(message, desc)

        self.value = value
        self.position = position

    def __str__(self):
        return '%s (at position %s in %r)' % (self.message, self.position, self.value)
