"""Time domain package.

`Time` stores an instant as whole epoch seconds; `Timezone` resolves IANA identifiers
to zone rules and is applied only when rendering.
"""
