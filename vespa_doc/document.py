import requests

from . import util
from .target import Target

DOCUMENT_PATH = '/document/v1/'
DOCUMENT_TIMEOUT = 60
SERVICE_DESCRIPTION = 'Container (document API)'


def document_url(target: Target, document_id: str) -> str:
    return target.url('document') + DOCUMENT_PATH + document_id


def status_line(response: requests.Response) -> str:
    return f'{response.status_code} {response.reason}'


def put(document_id: str, json_file: str, target: Target) -> bool:
    """
    Put the document in json_file under document_id.

    The file is streamed as the request body without being parsed.
    Returns True only when the document API answers 200.
    """
    # TODO: support taking the document id from the "put" field of the JSON
    url = document_url(target, document_id)
    headers = {'Content-Type': 'application/json'}

    try:
        f = open(json_file, 'rb')
    except OSError as e:
        util.error('Could not open file at ' + json_file)
        util.detail(str(e))
        return False

    with f:
        request = requests.Request('POST', url, headers=headers, data=f).prepare()
        response = util.http_do(request, DOCUMENT_TIMEOUT, SERVICE_DESCRIPTION)
        if response is None:
            return False

        with response:
            if response.status_code == 200:
                util.success('Success: put', document_id)
                return True
            if response.status_code // 100 == 4:
                util.error(f'Invalid document ({status_line(response)}):')
            else:
                util.error('Error from', SERVICE_DESCRIPTION.lower(), 'at',
                           util.host_of(request.url), f'({status_line(response)}):')
            util.print_reader(response)
            return False


def get(document_id: str, target: Target) -> bool:
    util.error('Document get is not implemented')
    util.detail(f'Could not get {document_id} from {document_url(target, document_id)}')
    return False
