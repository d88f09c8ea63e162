# joinapp

A small HTTP service that greets users who join by name. It is built in layers,
each taking the one below it as a constructor argument:

- `joinapp.entity`: the `User` dataclass (`name`, `id`), with `validate()`, which
  raises `MissingUsernameError` for a blank name, and `to_dict()`
- `joinapp.repository`: `UserRepository`, whose `create(user)` gives the user an id
- `joinapp.usecase`: `UserUseCase`, whose `create_user(username)` builds a `User`
  and passes it to the store; `UserStore` is the protocol the store must meet
- `joinapp.handler`: `UserHandler`, whose `register_user(username)` returns a
  `JsonResponse` (`status`, `payload`, `body()`); `UserCreator` is the protocol
  for the use case it wraps
- `joinapp.router`: `Router`, a WSGI application, and `setup_routes`, which
  serves `GET /join/:username`; `UserRegistrar` is the protocol for the handler
- `joinapp.app`: `App`, `init_app`, `parse_address` and the `main` entry point

Any layer can be replaced by another object with the same method.

## Installing

```
pip install .
```

## Running

```
joinapp
```

The server listens on `localhost:9420` by default, using the standard library's
`wsgiref` server. Another address can be given as `host:port`:

```
joinapp --address 0.0.0.0:8080
```

A request such as

```
GET /join/daniel
```

is answered with status 200 and

```json
{"code":200,"message":"daniel(9420): playing di"}
```

If creating the user raises, the answer is status 500 with
`{"code":500,"message":"Internal Server Error"}`. Any other path or method gets
status 404 with `{"code":404,"message":"Not Found"}`. Each request is logged
with its method, path and status. Ctrl-C stops the server.

## Using it from Python

```python
from joinapp.app import init_app

app = init_app()
app.run("localhost:9420")
```

The parts can also be wired by hand, and the router called without a server:

```python
from joinapp.app import App
from joinapp.handler import UserHandler
from joinapp.repository import UserRepository
from joinapp.router import setup_routes
from joinapp.usecase import UserUseCase

router = setup_routes(UserHandler(UserUseCase(UserRepository())))
response = router.dispatch("GET", "/join/daniel")
print(response.status, response.body())
App(router).run("localhost:9420")
```

`parse_address("localhost:9420")` returns `("localhost", 9420)` and raises
`ValueError` for an address without a valid port.

## What it does not do

There is no storage. `UserRepository.create` keeps nothing; it only sets the
user's id to `"9420"`, so every user gets that id. The use case does not call
`User.validate()`, so a blank name is not rejected on its way through the service.

## Tests

```
pip install .[test]
pytest
```