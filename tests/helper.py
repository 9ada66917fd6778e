import socketserver

from requests.structures import CaseInsensitiveDict


class NullServer(socketserver.TCPServer):

    request_queue_size = 1

    def __init__(self, server_address, *args, **kwargs):
        # simply init'ing is sufficient to open the port, which
        # with the server not started creates a black hole server
        socketserver.TCPServer.__init__(
            self, server_address, socketserver.BaseRequestHandler,
            *args, **kwargs)


class FakeResponse(object):
    '''The parts of ``requests.Response`` the facades look at.'''

    def __init__(self, status_code, text='', headers=None, reason=None):
        self.status_code = status_code
        self.text = text
        self.headers = CaseInsensitiveDict(headers or {})
        self.reason = reason


class FakeTransport(object):
    '''Transport double replaying canned responses in order.'''

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def send(self, method, path, query=None, body=None, headers=None):
        self.calls.append((method, path, query, body, headers))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
