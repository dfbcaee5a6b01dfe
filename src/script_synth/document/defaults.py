"""Starter programs shown when no saved document exists."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import normalize_language

LANGUAGE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("python", "Python"),
    ("javascript", "JavaScript"),
    ("typescript", "TypeScript"),
    ("java", "Java"),
    ("cpp", "C++"),
    ("csharp", "C#"),
    ("ruby", "Ruby"),
    ("go", "Go"),
    ("php", "PHP"),
    ("rust", "Rust"),
    ("swift", "Swift"),
    ("kotlin", "Kotlin"),
)

PLACEHOLDER_PROGRAM = """\
// Code Example
console.log("Hello, World!");

// Select a language to see a language-specific example."""

_PYTHON = """\
# Python Code Example
console.log("Hello, Python!")


def fibonacci(n):
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


# Print first 10 fibonacci numbers
for i in range(10):
    print(f"Fibonacci({i}): {fibonacci(i)}")"""

_JAVASCRIPT = """\
// JavaScript Code Example
console.log("Hello, World!");

function fibonacci(n) {
  if (n <= 1) return n;
  return fibonacci(n - 1) + fibonacci(n - 2);
}

for (let i = 0; i < 10; i++) {
  console.log(`Fibonacci(${i}): ${fibonacci(i)}`);
}"""

_TYPESCRIPT = """\
// TypeScript Code Example
console.log("Hello, TypeScript!");

function fibonacci(n: number): number {
  if (n <= 1) return n;
  return fibonacci(n - 1) + fibonacci(n - 2);
}

for (let i = 0; i < 10; i++) {
  console.log(`Fibonacci(${i}): ${fibonacci(i)}`);
}"""

_JAVA = """\
// Java Code Example
public class Main {
    public static void main(String[] args) {
        System.out.println("Hello, Java!");
        for (int i = 0; i < 10; i++) {
            System.out.println("Fibonacci(" + i + "): " + fibonacci(i));
        }
    }

    public static int fibonacci(int n) {
        if (n <= 1) return n;
        return fibonacci(n - 1) + fibonacci(n - 2);
    }
}"""

_CPP = """\
// C++ Code Example
#include <iostream>

int fibonacci(int n) {
    if (n <= 1) return n;
    return fibonacci(n - 1) + fibonacci(n - 2);
}

int main() {
    std::cout << "Hello, C++!" << std::endl;
    for (int i = 0; i < 10; i++) {
        std::cout << "Fibonacci(" << i << "): " << fibonacci(i) << std::endl;
    }
    return 0;
}"""

_CSHARP = """\
// C# Code Example
using System;

class Program {
    static void Main() {
        Console.WriteLine("Hello, C#!");
        for (int i = 0; i < 10; i++) {
            Console.WriteLine($"Fibonacci({i}): {Fibonacci(i)}");
        }
    }

    static int Fibonacci(int n) {
        if (n <= 1) return n;
        return Fibonacci(n - 1) + Fibonacci(n - 2);
    }
}"""

_RUBY = """\
# Ruby Code Example
puts "Hello, Ruby!"

def fibonacci(n)
  return n if n <= 1
  fibonacci(n - 1) + fibonacci(n - 2)
end

10.times do |i|
  puts "Fibonacci(#{i}): #{fibonacci(i)}"
end"""

_GO = """\
// Go Code Example
package main

import "fmt"

func fibonacci(n int) int {
    if n <= 1 {
        return n
    }
    return fibonacci(n-1) + fibonacci(n-2)
}

func main() {
    fmt.Println("Hello, Go!")
    for i := 0; i < 10; i++ {
        fmt.Printf("Fibonacci(%d): %d\\n", i, fibonacci(i))
    }
}"""

_PHP = """\
<?php
// PHP Code Example
echo "Hello, PHP!\\n";

function fibonacci($n) {
    if ($n <= 1) return $n;
    return fibonacci($n - 1) + fibonacci($n - 2);
}

for ($i = 0; $i < 10; $i++) {
    echo "Fibonacci($i): " . fibonacci($i) . "\\n";
}
?>"""

_RUST = """\
// Rust Code Example
fn main() {
    println!("Hello, Rust!");
    for i in 0..10 {
        println!("Fibonacci({}): {}", i, fibonacci(i));
    }
}

fn fibonacci(n: u32) -> u32 {
    if n <= 1 {
        return n;
    }
    fibonacci(n - 1) + fibonacci(n - 2)
}"""

_SWIFT = """\
// Swift Code Example
print("Hello, Swift!")

func fibonacci(_ n: Int) -> Int {
    if n <= 1 { return n }
    return fibonacci(n - 1) + fibonacci(n - 2)
}

for i in 0..<10 {
    print("Fibonacci(\\(i)): \\(fibonacci(i))")
}"""

_KOTLIN = """\
// Kotlin Code Example
fun main() {
    println("Hello, Kotlin!")
    for (i in 0 until 10) {
        println("Fibonacci($i): ${fibonacci(i)}")
    }
}

fun fibonacci(n: Int): Int {
    if (n <= 1) return n
    return fibonacci(n - 1) + fibonacci(n - 2)
}"""

DEFAULT_PROGRAMS: Mapping[str, str] = MappingProxyType(
    {
        "python": _PYTHON,
        "javascript": _JAVASCRIPT,
        "typescript": _TYPESCRIPT,
        "java": _JAVA,
        "cpp": _CPP,
        "c++": _CPP,
        "csharp": _CSHARP,
        "c#": _CSHARP,
        "ruby": _RUBY,
        "go": _GO,
        "php": _PHP,
        "rust": _RUST,
        "swift": _SWIFT,
        "kotlin": _KOTLIN,
    }
)


def default_code(language: str) -> str:
    """Example program for ``language``; unknown tags get a placeholder."""

    return DEFAULT_PROGRAMS.get(normalize_language(language), PLACEHOLDER_PROGRAM)


__all__ = ["DEFAULT_PROGRAMS", "LANGUAGE_OPTIONS", "PLACEHOLDER_PROGRAM", "default_code"]
