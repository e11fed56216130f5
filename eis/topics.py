from enum import StrEnum


class Diagnostic(StrEnum):
    INIT_ERROR = "InitError"
    CLONE_ERROR = "CloneError"
    FREEZE_ERROR = "FreezeError"
    SET_ERROR = "SetError"
    SUBSCRIBE_ERROR = "SubscribeError"
    LISTENER_ERROR = "ListenerError"

    NO_OP = "NoOp"

    # debug traces
    ALREADY_FROZEN = "AlreadyFrozen"
    NOTIFY = "Notify"
