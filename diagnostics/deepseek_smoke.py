# diagnostics/deepseek_smoke.py
"""
DeepSeek Smoke Test
===================

Drives the live DeepSeek API through the legacy content-generation surface.
Needs DEEPSEEK_API_KEY (a .env file works).
"""
import asyncio
import time

from content_bridge import (
    AuthType,
    create_content_generator,
    create_generator_config,
    load_settings,
)

QUESTIONS = [
    ("Basic Math", "What is 2+2?"),
    ("Code Generation", "Write a simple Hello World function in Python"),
    ("Knowledge Query", "Explain what DeepSeek is in one sentence"),
    ("Structured Response", "List 3 benefits of using AI assistants"),
]


async def ask(generator, name, question):
    print(f"\n🧪 Testing: {name}")
    print(f"❓ Question: {question}")
    try:
        response = await generator.generate_content(
            {"messages": [{"role": "user", "content": question}], "max_tokens": 200},
            f"smoke-{name}",
        )
        print(f"✅ Answer: {response.text}")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


async def stream(generator):
    print("\n🔍 Testing streaming...")
    start_time = time.time()
    fragments = 0
    fragment_stream = await generator.generate_content_stream(
        {"contents": ["Count from 1 to 5, one number per line"]}, "smoke-stream"
    )
    print("Response: ", end="", flush=True)
    async for fragment in fragment_stream:
        fragments += 1
        print(fragment.text, end="", flush=True)
    print(f"\n📊 {fragments} fragments in {time.time() - start_time:.2f}s")


async def main():
    settings = load_settings()
    config = create_generator_config(AuthType.USE_DEEPSEEK, settings)
    generator = create_content_generator(config, settings)

    try:
        passed = 0
        for name, question in QUESTIONS:
            if await ask(generator, name, question):
                passed += 1
        print(f"\n📊 {passed}/{len(QUESTIONS)} questions answered")

        await stream(generator)

        tokens = await generator.count_tokens({"contents": ["abcd", "efgh"]})
        print(f"\n🔢 Estimated tokens for ['abcd', 'efgh']: {tokens.total_tokens}")
    finally:
        await generator.close()


if __name__ == "__main__":
    asyncio.run(main())
