"""Passwords too easily guessed to be accepted."""

COMMON_PASSWORDS = frozenset([
    '000000', '00000000', '101010', '10203', '102030', '1111', '111111',
    '1111111', '11111111', '1111111111', '112233', '11223344', '121212', '123',
    '123123', '123123123', '123321', '1234', '12341234', '12345', '123456',
    '1234567', '12345678', '123456789', '1234567890', '12345678910',
    '123456789a', '123456a', '123456b', '12345a', '1234qwer', '123654',
    '123abc', '123qwe', '131313', '142536', '147258', '147258369', '159357',
    '159753', '1q2w3e', '1q2w3e4r', '1q2w3e4r5t', '1qaz2wsx', '20100728',
    '222222', '25251325', '333333', '456789', '5201314', '555555', '654321',
    '6655321', '666666', '686584', '777777', '7777777', '789456', '789456123',
    '888888', '88888888', '987654', '987654321', '999999', 'Bangbang123',
    'Million2', 'Sample123', 'a12345', 'a123456', 'a123456789', 'a801016',
    'aaaaaa', 'aaron431', 'abc123', 'abcd1234', 'alexander', 'amanda',
    'andrea', 'andrew', 'angel1', 'anhyeuem', 'anthony', 'asd123', 'asdasd',
    'asdf1234', 'asdfgh', 'asdfghjkl', 'ashley', 'azerty', 'b123456',
    'babygirl1', 'bailey', 'baseball', 'basketball', 'batman', 'blink182',
    'buster', 'butterfly', 'charlie', 'chatbooks', 'cheese', 'chocolate',
    'computer', 'cookie', 'daniel', 'default', 'dragon', 'evite', 'family',
    'flower', 'football', 'football1', 'fuckyou', 'fuckyou1', 'gabriel',
    'ginger', 'hannah', 'hello', 'hello123', 'hunter', 'iloveu', 'iloveyou',
    'iloveyou1', 'jacket025', 'jakcgt333', 'jennifer', 'jessica', 'jesus1',
    'jobandtalent', 'jordan', 'jordan23', 'joshua', 'justin', 'killer',
    'letmein', 'lol123', 'love', 'love123', 'lovely', 'loveme', 'madison',
    'maggie', 'master', 'matthew', 'michael', 'michael1', 'michelle', 'monkey',
    'myspace1', 'naruto', 'nicole', 'ohmnamah23', 'omgpop', 'party',
    'password', 'password1', 'password123', 'peanut', 'pepper', 'picture1',
    'pokemon', 'princess', 'princess1', 'purple', 'q1w2e3r4', 'qazwsx',
    'qqww1122', 'qwe123', 'qwer1234', 'qwer123456', 'qwerty', 'qwerty1',
    'qwertyuiop', 'robert', 'samantha', 'samsung', 'senha', 'shadow', 'soccer',
    'starwars', 'summer', 'sunshine', 'superman', 'taylor', 'tigger',
    'trustno1', 'unknown', 'welcome', 'whatever', 'x4ivygA51F', 'yugioh',
    'zing', 'zxcvbnm',
])
