"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

LANGUAGE = "javascript"

GLOBAL_FRAME_NAME = "Global"
GLOBAL_SCOPE_LABEL = "global"

STEP_ID_TEMPLATE = "step-{index}"
OBJ_ADDR_TEMPLATE = "obj_{index}"

DEFAULT_MAX_CALL_DEPTH = 100

UNDEFINED_TEXT = "undefined"
OBJECT_TEXT = "[object Object]"
FUNCTION_TEXT_TEMPLATE = "[Function: {name}]"

ERROR_NODE_TYPE = "ERROR"

DEMO_SOURCE = """\
var greeting = "hello";
let user = { name: "Ada", role: "admin" };

function greet() {
  var message = greeting;
  console.log(message);
  console.log(user.name);
}

greet();
user.role = "owner";
console.log(user.role);
"""
