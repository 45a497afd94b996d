"""Shared enums and constants for the signaling protocol."""

import string
from enum import Enum

ROOM_CODE_LENGTH = 5
ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits
ROOM_CODE_MAX_ATTEMPTS = 1000
MAX_ROOM_NAME_LENGTH = 32
DEFAULT_ROOM_NAME = "New Room"


class Role(str, Enum):
    HOST = "host"
    GUEST = "guest"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class MessageType(str, Enum):
    # client -> server
    CREATE_ROOM = "create_room"
    JOIN_ROOM = "join_room"
    GET_ROOMS = "get_rooms"
    OFFER = "offer"
    ANSWER = "answer"
    ICE_CANDIDATE = "ice_candidate"
    # server -> client
    ROOM_CREATED = "room_created"
    ROOM_JOINED = "room_joined"
    ROOMS_LIST = "rooms_list"
    ROOM_NOT_FOUND = "room_not_found"
    WRONG_PASSWORD = "wrong_password"
    OPPONENT_LEFT = "opponent_left"
    ERROR = "error"
