import logging

from hyperagent import Agent

logging.basicConfig(level=logging.DEBUG)

# start examples/quickstart_server.py first
agent = Agent('http://localhost:5000/')

print(list(agent.relations))

print(agent.request('users/create', {'name': 'Grace'}).data)
print(agent.request('users').data)

self_relation = agent.schema('/schemas/users')['self']
print(agent.request(self_relation, uri_params={'id': 2}).data)
