# kicache

kicache is a small REST service for looking up Dragon Ball characters by
name. The first lookup of a character goes to the public Dragon Ball API
(`https://dragonball-api.com/api/characters?name=<name>`), and the service
stores the first character the API returns in a Redis hash. Later lookups of
the same name are served from Redis.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
kicache
```

Options:

| Option        | Default                    | Meaning                      |
|---------------|----------------------------|------------------------------|
| `--redis-url` | `redis://op-redis:6379/0`  | Redis instance used as cache |
| `--host`      | `0.0.0.0`                  | Address to listen on         |
| `--port`      | `8080`                     | Port to listen on            |

The server is Flask's built-in development server, started with `app.run`.
The Redis connection is closed when the server stops.

## Endpoints

| Method | Path                 | Body               | Purpose                      |
|--------|----------------------|--------------------|------------------------------|
| GET    | `/characters/<name>` | none               | Look a character up by name  |
| POST   | `/characters/`       | `{"name": "Goku"}` | Same lookup, name in a body  |

Responses:

- `200` with the character as JSON. Its fields are `ID`, `Name`, `Ki`,
  `MaxKi`, `Race`, `Gender`, `Description`, `Image` and `Affiliation`.
- `400` with `{"error": "name es requerido"}` if the POST body is not a JSON
  object with a non-empty string `name`.
- `500` with `{"error": ...}` for any other failure. This includes a name
  the external API has no character for: the service reports failures of
  the external API as `ExternalAPIError`, so such a lookup answers `500`
  with `{"error": "external api: character not found"}`. It also includes a
  non-200 answer from the API, a network error, or Redis being unreachable.

The handler answers `404` with `{"error": "character not found"}` only when
the service itself raises `NotFoundError`, which `CharacterService` does not
do.

For example:

```
curl http://localhost:8080/characters/Goku
curl -X POST -H 'Content-Type: application/json' \
     -d '{"name": "Vegeta"}' http://localhost:8080/characters/
```

## Using it as a library

```python
import redis

from kicache.client import DragonBallClient
from kicache.handler import create_app
from kicache.redis_repository import RedisRepository
from kicache.service import CharacterService

repository = RedisRepository(redis.Redis(host="localhost", port=6379))
service = CharacterService(repository, DragonBallClient())

character = service.find_or_create("Goku")
print(character.name, character.ki)

app = create_app(service)  # a Flask application
```

The parts:

- `kicache.models`: the `Character` dataclass (with `to_dict()` and
  `Character.from_json(data)`), `NotFoundError`, and the
  `CharacterRepository` protocol (`save`, `find_by_name`).
- `kicache.redis_repository`: `RedisRepository(client)` and `key_for(name)`.
- `kicache.client`: `DragonBallClient(base_url, timeout, session)` with
  `fetch_by_name(name)`, which raises `NotFoundError` when the API returns
  no match and `ExternalAPIError` for transport, status or decoding failures.
  The timeout defaults to 10 seconds.
- `kicache.service`: the `ExternalClient` protocol and
  `CharacterService(repository, client)` with `find_or_create(name)`.
- `kicache.handler`: `create_app(service)`.
- `kicache.main`: `build_app(redis_url)` wires these same parts together
  from a Redis URL and keeps the Redis client in `app.extensions["redis"]`;
  `main(argv)` is the `kicache` command.

Redis keys have the form `character:<lower-cased name>`. This means lookups
that differ only in case share one cache entry. Stored entries never expire.