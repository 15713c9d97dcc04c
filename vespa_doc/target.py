import os
from typing import NamedTuple, Optional

TARGET_ENV = 'VESPA_CLI_TARGET'
DEFAULT_TARGET = 'local'

LOCAL_HOST = 'http://127.0.0.1'
DEPLOY_PORT = 19071
CONTAINER_PORT = 8080

CONTEXTS = ('deploy', 'query', 'document')


class TargetError(Exception):
    pass


class Target(NamedTuple):
    name: str
    deploy: str
    query: str
    document: str

    def url(self, context: str) -> str:
        if context not in CONTEXTS:
            raise TargetError(f"Unknown service context '{context}'")
        return getattr(self, context)


def target_name(explicit: Optional[str] = None) -> str:
    return explicit or os.environ.get(TARGET_ENV) or DEFAULT_TARGET


def get_target(name: Optional[str] = None) -> Target:
    """
    Resolve a target name to the base URL of each service.

    'local' points at a Vespa instance on this machine; an http(s) URL
    is used as-is for every service.
    """
    name = target_name(name)
    if name == 'local':
        return Target(name,
                      f'{LOCAL_HOST}:{DEPLOY_PORT}',
                      f'{LOCAL_HOST}:{CONTAINER_PORT}',
                      f'{LOCAL_HOST}:{CONTAINER_PORT}')
    if name.startswith('http://') or name.startswith('https://'):
        base = name.rstrip('/')
        return Target(name, base, base, base)
    raise TargetError(f"Unknown target '{name}': use 'local' or an http(s) URL")
