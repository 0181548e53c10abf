from blinker import Namespace

_agent = Namespace()

root_loaded = _agent.signal('root-loaded')

schema_loaded = _agent.signal('schema-loaded')

before_request = _agent.signal('before-request')

after_request = _agent.signal('after-request')
