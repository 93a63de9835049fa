"""Example test file using the module-level API.

Run with ``python examples/arithmetic.py``; the exit status is 1 if any
test fails.
"""

import asyncio

from minispec import describe, expect, run, test


def arithmetic():
    def adds():
        result = 2 + 3
        expect(result).to_be(5)

    def multiplies():
        result = 4 * 4
        expect(result).to_be(16)

    test("should add two numbers correctly", adds)
    test("should multiply two numbers correctly", multiplies)


describe("Arithmetic Operations", arithmetic)


@describe("String Operations")
def strings():
    @test("should concatenate strings")
    def concatenates():
        expect("Hello " + "World").to_be("Hello World")

    @test("should wait for async work")
    async def awaits():
        await asyncio.sleep(0.01)
        expect("".join(["a", "b"])).to_be("ab")


if __name__ == "__main__":
    run()
