# sigtalk

Receive a line of text from another process carried by nothing but
`SIGUSR1` and `SIGUSR2`. Each byte arrives as eight signals, most
significant bit first: `SIGUSR2` for a one bit, `SIGUSR1` for a zero. A
zero byte closes the message; the server then writes a newline and
answers the sender with `SIGUSR2`.

POSIX systems only, since the signals are POSIX ones.

## Install

    pip install .

## Running the server

    sigtalk-server
    Server PID: 12345

The server prints its process id and then waits for signals, writing each
byte to standard output as soon as its eight bits are in. It runs until
interrupted with Ctrl-C.

## What is not included

The package has no sending program. There is no command or function that
takes a process id and a message and signals it to a running server. The
bits to send can be produced with `encode_bits` (below); delivering them
as signals is left to the caller.

## Library

The bit protocol works without real signals:

```python
from sigtalk.encoding import encode_bits, BitDecoder

bits = list(encode_bits("hi"))   # 8 bits per UTF-8 byte plus 8 zero bits
decoder = BitDecoder()
received = [decoder.feed(bit) for bit in bits]
```

`BitDecoder.feed` returns the byte value once eight bits have arrived and
`None` before then; `BitDecoder.pending` tells how many bits of the
current byte are held. A bit other than 0 or 1 raises `ValueError`.

`sigtalk.server.Server(stream)` decodes signals into bytes written to a
binary stream of your choice (standard output by default).
`Server.handle(signum, sender_pid)` takes one signal as one bit, and
`Server.serve()` prints the process id and handles `SIGUSR1`/`SIGUSR2`
forever.

The package also carries small helpers:

- `sigtalk.formatting`: `format_string` and `printf` for
  `%c %s %d %i %u %x %X %p %%`
- `sigtalk.convert`: `atoi`, `itoa`
- `sigtalk.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`
- `sigtalk.chars`: ASCII classification and case conversion
- `sigtalk.textops`: `split`, `strtrim`, `substr`, `strjoin`,
  `map_indexed`, `for_each_indexed`
- `sigtalk.searching`: `find_substring`, `find_char`, `find_last_char`,
  `compare`, `compare_bytes`, `find_byte`
- `sigtalk.linkedlist`: `Node` and `LinkedList`

## Tests

    pip install .[test]
    pytest