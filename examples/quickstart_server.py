from flask import Flask, jsonify, request

app = Flask(__name__)

users = [{'id': 1, 'name': 'Ada'}]


@app.route('/')
def root():
    return jsonify({
        '_links': [
            {'name': 'users', 'href': '/users', 'schema': {'href': '/schemas/users'}}
        ]
    })


@app.route('/schemas/users')
def users_schema():
    return jsonify({
        '$schema': 'http://json-schema.org/draft-04/hyper-schema#',
        'defaultRelation': 'all',
        'links': [
            {'rel': 'all', 'href': '/users', 'method': 'GET'},
            {'rel': 'create', 'href': '/users', 'method': 'POST'},
            {'rel': 'self', 'href': '/users/{id}', 'method': 'GET'}
        ]
    })


@app.route('/users', methods=['GET', 'POST'])
def users_view():
    if request.method == 'POST':
        user = dict(request.get_json(), id=len(users) + 1)
        users.append(user)
        return jsonify(user), 201
    return jsonify(users)


@app.route('/users/<int:id>')
def user_view(id):
    return jsonify(users[id - 1])


if __name__ == '__main__':
    app.run()
