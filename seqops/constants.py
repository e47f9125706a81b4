"""Shared constant values for the seqops native modules."""

MODULE_NAME = "core:Native.Data.Array"
MODULE_VERSION = "1.0.0"
MODULE_ID = f"{MODULE_NAME}:{MODULE_VERSION}"

MAYBE_MODULE_ID = "core:Native.Data.Maybe:1.0.0"

LOGGER_NAME = "seqops"
LOG_LEVEL_ENV = "SEQOPS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# One line per export, in the order the module documents them.
ARRAY_SIGNATURES = """
length :: Array a -> Int
find :: (a -> Bool) -> Array a -> Maybe a
find_map :: (a -> Maybe b) -> Array a -> Maybe b
map :: (a -> b) -> Array a -> Array b
indexed_map :: (Int -> a -> b) -> Array a -> Array b
append :: a -> Array a -> Array a
prepend :: a -> Array a -> Array a
slice :: Int -> Int -> Array a -> Array a
range :: Int -> Int -> Array Int
concat :: Array a -> Array a -> Array a
reduce :: (() -> b) -> (a -> Array a -> b) -> Array a -> b
flatten :: Array (Array a) -> Array a
zip_with :: (a -> b -> c) -> Array a -> Array b -> Array c
join :: String -> Array a -> String
filter :: (a -> Bool) -> Array a -> Array a
sort :: (a -> a -> Int) -> Array a -> Array a
fold_l :: b -> (b -> a -> b) -> Array a -> b
fold_r :: b -> (a -> b -> b) -> Array a -> b
sum :: Array Num -> Num
drop :: Int -> Array a -> Array a
at :: Int -> Array a -> Maybe a
set :: Int -> a -> Array a -> Array a
any :: (a -> Bool) -> Array a -> Bool
all :: (a -> Bool) -> Array a -> Bool
"""

__all__ = [
    "ARRAY_SIGNATURES",
    "DEFAULT_LOG_LEVEL",
    "LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "MAYBE_MODULE_ID",
    "MODULE_ID",
    "MODULE_NAME",
    "MODULE_VERSION",
]
