# Copyright 2015 Spotify AB. All rights reserved.
#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.


class NXAPIClientException(Exception):
    """
    Base Exception Class.
    """

    pass


class MalformedDuration(NXAPIClientException, ValueError):
    """
    The text is not a duration in any of the accepted forms:
    ISO-8601 (P7DT12H2M5S), compact (1w2d) or clock (00:04:30).
    """

    def __init__(self, text, reason=""):
        self.text = text
        self.reason = reason
        super().__init__(text, reason)

    def __str__(self):
        msg = 'invalid duration "{}"'.format(self.text)
        if self.reason:
            msg += ": {}".format(self.reason)
        return msg


class MalformedTimeStamp(NXAPIClientException, ValueError):
    """
    The text is not a timestamp in one of the NX-OS layouts.
    """

    def __init__(self, text, reason=""):
        self.text = text
        self.reason = reason
        super().__init__(text, reason)

    def __str__(self):
        msg = 'invalid timestamp "{}"'.format(self.text)
        if self.reason:
            msg += ": {}".format(self.reason)
        return msg


class DecodeError(NXAPIClientException):
    """
    A field of an NX-API response could not be decoded.

    ``path`` is the dotted location of the field, e.g.
    ``body.vrfs[0].neighbors[3].last_flap``.
    """

    def __init__(self, path, message):
        self.path = path
        self.message = message
        super().__init__(path, message)

    def __str__(self):
        return "{}: {}".format(self.path, self.message)


class UnsupportedCommand(NXAPIClientException):
    """
    No decoder is registered for the command.
    """

    pass


class NXAPIError(NXAPIClientException):
    """
    Generic NX-API transport exception.
    """

    pass


class NXAPICommandError(NXAPIError):
    """
    The device rejected a command: a clierror, a JSON-RPC error or an output
    code other than 200.
    """

    def __init__(self, command, message):
        self.command = command
        self.message = message
        super().__init__(command, message)

    def __repr__(self):
        return 'The command "{}" gave the error "{}".'.format(
            self.command, self.message
        )

    __str__ = __repr__


class NXAPIConnectionError(NXAPIError):
    """
    The HTTP POST could not reach the device.
    """

    pass


class NXAPIAuthError(NXAPIError):
    """
    The device refused the credentials.
    """

    pass


class NXAPIPostError(NXAPIError):
    """
    The device answered the POST with something that is not an NX-API envelope.
    """

    pass
