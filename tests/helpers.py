"""Visitor that records what a deserializer handed it."""

from urlform_core.visitor import Visitor


class Recorder(Visitor):
    def visit_bool(self, value):
        return ("bool", value)

    def visit_int(self, value):
        return ("int", value)

    def visit_float(self, value):
        return ("float", value)

    def visit_str(self, value):
        return ("str", value)

    def visit_bytes(self, value):
        return ("bytes", value)

    def visit_unit(self):
        return ("unit",)

    def visit_none(self):
        return ("none",)

    def visit_some(self, deserializer):
        return ("some", deserializer)

    def visit_newtype(self, deserializer):
        return ("newtype", deserializer)

    def visit_enum(self, variant):
        return ("enum", variant)

    def visit_seq(self, seq):
        return ("seq", list(seq))

    def visit_map(self, entries):
        return ("map", list(entries))
