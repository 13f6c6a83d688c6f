import attrs


@attrs.define(frozen=True)
class Review:
    author: str
    comment: str
    rating: float

    def render(self) -> str:
        return f'{self.author}: {self.comment}'
