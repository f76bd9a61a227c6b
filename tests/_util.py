from cmdrecipe import metadata


class Greet:
    metadata = metadata("greet", "Say hello")


class Serve:
    metadata = metadata("server", "Run the HTTP server")


class Unregistered:
    metadata = metadata("orphan")


class Outer:
    class Inner:
        metadata = metadata("inner")


not_a_class = Greet()
