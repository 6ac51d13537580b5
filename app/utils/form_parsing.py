"""
Request class whose form parser raises on malformed bodies.

werkzeug's default parser swallows parse errors and leaves request.form and
request.files empty, which makes a broken multipart body look like a request
without a file.
"""

from flask import Request
from werkzeug.formparser import FormDataParser


class StrictFormDataParser(FormDataParser):

    def __init__(self, *args, **kwargs):
        kwargs['silent'] = False
        super().__init__(*args, **kwargs)


class StrictFormRequest(Request):
    form_data_parser_class = StrictFormDataParser
