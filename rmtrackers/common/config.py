from pathlib import Path

DEFAULT_CREATED_BY = "rmtrackers"
DEFAULT_COMMENT = "trackers removed with rmtrackers"


class Config:
    __slots__ = ("verbose", "created_by", "comment", "log_file")

    def __init__(
        self,
        verbose: bool = False,
        created_by: str = DEFAULT_CREATED_BY,
        comment: str = DEFAULT_COMMENT,
        log_file: Path | None = None,
    ):
        self.verbose = verbose
        self.created_by = created_by
        self.comment = comment
        self.log_file = log_file

    @classmethod
    def from_args(cls, args) -> "Config":
        return cls(
            verbose=args.verbose,
            created_by=args.created_by,
            comment=args.comment,
            log_file=args.log_file,
        )

    def __repr__(self):
        return (
            f"Config(verbose={self.verbose!r}, created_by={self.created_by!r}, "
            f"comment={self.comment!r}, log_file={self.log_file!r})"
        )
