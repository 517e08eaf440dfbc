from typing import Any, Protocol
from json import dumps, loads


class JsonCodec(Protocol):
    def dumps(self, obj: Any) -> str: ...

    def loads(self, text: str) -> Any: ...


class StdJsonCodec:
    # Swap in orjson/ujson by passing any object with these two methods
    def dumps(self, obj: Any) -> str:
        return dumps(obj, separators=(",", ":"), ensure_ascii=False)

    def loads(self, text: str) -> Any:
        return loads(text)


default_codec = StdJsonCodec()
