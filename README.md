# magicbot

A small IRC bot. It connects to a server, registers, joins its channels and
answers commands sent to it in a channel or in a private message. Replies go
back as `NOTICE` messages. It needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
magicbot --host 127.0.0.1 --port 6667 --password password --nick magic8bot --channel "#general"
```

| Option          | Default      | Meaning                                          |
|-----------------|--------------|--------------------------------------------------|
| `--host`        | `127.0.0.1`  | Server address                                   |
| `--port`        | `6667`       | Server port, 1 to 65535                          |
| `--password`    | empty        | Sent with `PASS`                                 |
| `--nick`        | `magic8bot`  | The bot's nickname                               |
| `--channel`     | none         | An extra channel to join                         |
| `--interactive` | off          | Forward every line typed on stdin to the server  |

On connecting the bot sends `PASS`, `NICK`, `USER bot 0 * magic`, joins the
channel given with `--channel` if any, and joins `#blackjack`. It runs until
the server closes the connection or it is stopped with Ctrl-C. The command
returns 1 when the connection fails.

## Commands

Send any of these as the text of a `PRIVMSG` to the bot or to a channel it is
in. A message sent to the bot or to `#blackjack` is answered to its sender; a
message to another channel is answered to that channel.

| Command       | Reply                                                        |
|---------------|--------------------------------------------------------------|
| `!q`          | A magic 8-ball answer                                        |
| `!flip`       | `Heads!` or `Tails!`                                         |
| `!rps`        | `Rock!`, `Paper!` or `Scissors!`                             |
| `!roll [N]`   | A number from 1 to N (also `!roll dN`); N defaults to 6 and must be 2 to 1024, otherwise `invalid input` |
| `!card`       | A random playing card glyph with its name, e.g. `ace of spades` |
| `!date`       | The current date, e.g. `Current date is Monday, 1st of July 2024.` |
| `!time`       | `Current server time is: HH:MM:SS` in local time             |
| `!utime`      | The same with microseconds                                   |
| `!blackjack`  | Starts a blackjack game with everyone in `#blackjack`        |
| `!initbj`     | Like `!blackjack`, but asks even while a game is running     |
| `!hit`        | Draws a card in the running game                             |
| `!stand`      | Stops drawing; the game ends when everyone stands            |

Unknown commands and other server messages are ignored (and logged).

## Blackjack

`!blackjack` sends `WHO #blackjack`. The bot collects the nicknames from the
`352` replies (leaving out itself) and, when the `315` end-of-list arrives,
starts a game if there are at least two players; otherwise it says
`Not enough players` in `#blackjack`. Each player is dealt two cards and sent
their hand privately.

Players `!hit` to draw and `!stand` to stop; each move is announced to the
other players and to `#blackjack`. When the last player stands, or once sixty
seconds have passed, every hand is shown to every player, sorted by rank, and
the players with the best score are announced as winners. A hand over 21
counts as its negative, so a bust always loses to a hand that did not bust.
Two aces alone score 22.

## Using the pieces directly

The game and protocol parts can be used on their own:

```python
import random

from magicbot.blackjack import BlackJack
from magicbot.message import Message

game = BlackJack(random.Random(1))
game.new_game()
game.add_player("alice")
game.add_player("bob")
print(game.show_hand("alice"))
game.stand("alice")
game.stand("bob")
print(game.announce_winner())

message = Message(":alice!al@example.com PRIVMSG #blackjack :!hit")
print(message.nick, message.command, message.params)
```

- `magicbot.message.Message` parses one line into `prefix`, `nick`, `user`,
  `host`, `command` and `params`; a line without a command raises
  `magicbot.message.MessageError`.
- `magicbot.cards` has `CardDeck`, `CardPlayer` and the hand `score` function.
- `magicbot.state.BotState` holds the table and queues outgoing lines;
  `magicbot.commands.dispatch` runs the handler for a parsed message.
- `magicbot.client.BotClient` ties these to a socket; `LineBuffer` splits
  incoming bytes into CRLF-terminated lines and drops lines over 512 bytes.

## What it does not do

- There is no configuration file; everything is given on the command line.
- There is no TLS and no reconnecting after the server closes the connection.
- The bot does not answer `PING`, so servers that require it may drop the bot.
- `!hit` or `!stand` from someone who is not seated in the running game raises
  `KeyError`, which stops the bot.