def capture(captureType):
    """
    Returns functions for data capture and retrieval.

    Arguments
    ---------
    - captureType: str
        The type of capture-return function pair to return

    Return
    ------
    capture(), return()
    """
    storage = {'data': None}

    def captureWrite(dstfile, code):
        """
        Captures written code into a storage object, keyed by file.
        Can be used interchangeably with system.writeCode().
        """
        storage['data'][dstfile] = code

    def returnData():
        """Returns the captured data"""
        return storage['data']

    if captureType == 'write':
        storage['data'] = {}
        return captureWrite, returnData


def source(code):
    """
    Returns a read handler that supplies the lines of code for any
    file.
    Can be used interchangeably with system.readLines().
    """
    def readLines(srcfile):
        return code.strip('\n').split('\n')
    return readLines
